class InvariantError(RuntimeError):
    """
    Raised when an input breaks an invariant of the cube model: a face, stage or mode
    outside of its domain, a case missing from a catalog or a broken geometric condition.
    These are programming errors, so nothing in the package catches them.
    """
