"""SimTimer — repeating buff countdown with a soft bell."""

__version__ = "0.1.0"
