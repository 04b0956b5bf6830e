class JurisdictionError(Exception):
    """Base class for all errors raised by the jurisdiction package."""


class DataIntegrityError(JurisdictionError):
    """The country/region data violates an integrity rule.

    Raised by the data compiler (and by the table loader when generated
    tables were edited by hand). ``rule`` names the failed check:
    "source", "alpha2", "alpha3", "numeric", "region" or "index".
    """

    def __init__(self, rule: str, message: str, value: object = None) -> None:
        super().__init__(f"[{rule}] {message}")
        self.rule = rule
        self.message = message
        self.value = value


class UnknownJurisdiction(JurisdictionError, LookupError):
    """No jurisdiction matches the given code."""

    def __init__(self, value: object) -> None:
        super().__init__(f"unrecognized ISO 3166 country code: {value!r}")
        self.value = value


class NoRegionClassification(JurisdictionError, LookupError):
    """The jurisdiction has no UN M49 classification at the requested level."""

    def __init__(self, alpha2: str, level: str, reason: str | None = None) -> None:
        detail = reason or f"{alpha2} has no {level} classification"
        super().__init__(detail)
        self.alpha2 = alpha2
        self.level = level
