"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class StoryApiError(ServiceError):
    """The search API could not be reached or answered with an unusable body."""


class StorageError(ServiceError):
    """The durable key/value store failed to read or write."""


class UnknownEventError(RuntimeError):
    """The reducer received an event it has no transition for."""
