# Written by the KerrSolve authors, October 2026.

# ======================================================================

class SolverError(RuntimeError):
    """
    Exception raised when a solver fails to converge (or cannot start).
    Any extra keyword arguments given when raised become attributes of
    the exception, allowing the caller to inspect the state of the
    solver at the point of failure.

    Parameters
    ----------
    *args :
        Passed to `RuntimeError`.
    flag : int, default = None
        Solver specific status / reason code.
    details : str, optional
        Human readable description of `flag`.
    **kwargs :
        Added as attributes.

    Examples
    --------
    >>> try:
    ...     raise SolverError("Failed:", flag=2, details="Too many steps.",
    ...                       x=1.5)
    ... except SolverError as e:
    ...     print(e.flag, e.x)
    2 1.5
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        super().__init__(*args)
        self.flag = flag
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        # Solver state is listed below the failure message.
        msg = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                msg += f"\n{k} -> {v}"
        return msg
