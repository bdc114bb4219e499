from dataclasses import dataclass


@dataclass(frozen=True)
class EvaluatorConfig:
    """
    Filter evaluation configuration.

    Attributes:
        case_exact: Whether string values are compared case-sensitively by equality and
            ordering operators. Substring operators (`co`, `sw`, `ew`) are always
            case-insensitive.
        parse_datetimes: Whether strings in xsd:dateTime format are compared chronologically
            rather than lexicographically.
    """

    case_exact: bool = False
    parse_datetimes: bool = True

    @classmethod
    def create(cls, case_exact: bool = False, parse_datetimes: bool = True) -> "EvaluatorConfig":
        """
        Creates `EvaluatorConfig`. Defaults follow RFC-7643, where string attributes are not
        case-exact unless stated otherwise.
        """
        return cls(case_exact=case_exact, parse_datetimes=parse_datetimes)


evaluator_config: EvaluatorConfig = EvaluatorConfig.create()


def set_evaluator_config(config: EvaluatorConfig) -> None:
    """
    Sets global evaluator configuration. Evaluators that are already created keep
    the configuration they were created with.
    """
    global evaluator_config
    evaluator_config = config
