from ean_eic_checker.checker.codes import (  # noqa: F401
    CheckResultCode,
    EanEicCode,
    classify,
    validate_ean,
    validate_eic,
)
