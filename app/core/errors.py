"""Volume engine error taxonomy.

All of them are ``ValueError`` subclasses so plain callers can catch them the
usual way; the HTTP layer maps the shared base to a 400 response.
"""


class VolumeError(ValueError):
    """Base class for every input the volume engine refuses."""


class InvalidWeight(VolumeError):
    """Weight missing, non-numeric, non-finite or negative."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid weight value: {value!r}")


class InvalidReps(VolumeError):
    """Reps missing, non-numeric, negative or fractional."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid reps value: {value!r}")


class InvalidVolume(VolumeError):
    """A volume to normalize is non-numeric, non-finite or negative."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid volume value: {value!r}")


class InvalidUnit(VolumeError):
    """Unit is neither kg nor lb."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid weight unit: {value!r} (expected 'kg' or 'lb')")
