"""Base exceptions for fieldcheck domain."""


class FieldCheckError(Exception):
    """Root exception for all fieldcheck errors.

    Raised only while building rules and validators.
    Evaluating a validator never raises.
    """
