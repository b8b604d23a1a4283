"""
Configuration constants for the directory cleaner.
"""

# --- Record Formatting ---
# Creation dates are always reported in UTC
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Prompts ---
SEARCH_PROMPT = "Please, provide the name of the file you want to search (including its file extension)"
KEEP_ALL_PROMPT = "Do you want to keep every file? \n(y/n)"
DELETE_PROMPT = "Please provide the number associated to the file you want to delete.\nWrite done to quit"

# --- Answers ---
KEEP_ALL_ANSWER = "y"
DONE_TOKEN = "done"

# --- Messages ---
GOODBYE_MSG = "Good Bye!"
NO_MATCHES_MSG = "No files named '{name}' were found."
INVALID_NUMBER_MSG = "Invalid number provided."
OUT_OF_RANGE_MSG = "Please provide one of the listed numbers!"
DELETED_MSG = "File deleted!"

USAGE = "Insufficient arguments provided.\n Usage: `dir-cleaner |relative_path_to_folder|`"

# --- Logging ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
