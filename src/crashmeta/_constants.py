"""Internal constants shared across the library."""

#: Maximum number of custom attributes held by one store.
MAX_ATTRIBUTES = 64

#: Maximum length of a stored key, value or user identifier.
MAX_ATTRIBUTE_SIZE = 1024
