"""Constants for strsplit - library defaults."""

# Encoding used to turn str delimiters into bytes when the haystack is bytes
DEFAULT_ENCODING = "utf-8"
