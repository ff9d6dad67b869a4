"""Constants for sistem_dokumen - defaults and program metadata."""

# Program metadata
PROGRAM_NAME = "sistem-dokumen"

# Processor key used when the pipeline config does not name one
DEFAULT_FORMAT = "plain"

# Display labels
PLAIN_TEXT_FORMAT_NAME = "Plain Text"
