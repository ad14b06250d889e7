"""Core building blocks shared by the server: logging, errors, validation and persistence."""
