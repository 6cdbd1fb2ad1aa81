"""Reading and parsing of collection sheets."""
