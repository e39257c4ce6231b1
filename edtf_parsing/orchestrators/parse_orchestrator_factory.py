from enum import Enum, auto

from edtf_parsing.config import ParserConfig
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator
from edtf_parsing.orchestrators.date_value_parse_orchestrator import DateValueParseOrchestrator
from edtf_parsing.orchestrators.edtf_parse_orchestrator import EdtfParseOrchestrator


class ParseOrchestratorTypes(Enum):
    DATE_VALUE = auto()
    EDTF = auto()


class ParseOrchestratorFactory:
    """Factory for creating parse orchestrators based on what is being parsed."""

    @staticmethod
    def get_orchestrator(orchestrator_type: ParseOrchestratorTypes, config: ParserConfig | None = None) -> ParseOrchestrator:
        """Get the parse orchestrator for the given type.

        Args:
            orchestrator_type: DATE_VALUE for one bare date, EDTF for a whole string
            config: Parser configuration shared by every strategy

        Returns:
            ParseOrchestrator: An instance of the corresponding parse orchestrator.

        Raises:
            ValueError: If the orchestrator type is not recognized.
        """
        if orchestrator_type == ParseOrchestratorTypes.DATE_VALUE:
            return DateValueParseOrchestrator(config)
        elif orchestrator_type == ParseOrchestratorTypes.EDTF:
            return EdtfParseOrchestrator(config)
        else:
            raise ValueError(f"Unknown orchestrator type: {orchestrator_type}")
