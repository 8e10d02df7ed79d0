"""Search defaults: word length, combination size and progress bar style."""

# Length of every candidate word; lines of any other length are skipped
WORD_LENGTH = 5

# Number of mutually disjoint words per combination
COMBINATION_LENGTH = 5

# Progress bar shown on stderr with --progress (one tick per starting word)
PROGRESS_BAR_FORMAT = "{elapsed} |{bar}| {percentage:3.0f}%"
PROGRESS_BAR_ASCII = " ▖▘▝▗▚▞█"

# Treated as "read from standard input" by the word list loader
STDIN_PATH = "-"
