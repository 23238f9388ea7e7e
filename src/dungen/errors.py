class DungenError(Exception):
    """Base exception for the dungen project."""


class ConfigError(DungenError):
    """Raised when a configuration file is missing, unparsable or invalid."""


class TextureError(DungenError):
    """Raised when the texture atlas cannot be read or does not hold a sprite."""


class UnsatisfiableConfigError(DungenError):
    """Raised when room placement runs out of attempts before reaching its target."""

    def __init__(self, target: int, placed: int, attempts: int):
        super().__init__(
            f"Placed {placed} of {target} rooms after {attempts} attempts; "
            "room sizes/counts cannot fit the map"
        )
        self.target = target
        self.placed = placed
        self.attempts = attempts
