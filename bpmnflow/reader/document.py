"""Document loading and schema validation for BPMN2 files."""

import logging
import warnings
from pathlib import Path

from lxml import etree

from bpmnflow.common.exceptions import (
    GuardError,
    MalformedDocumentError,
    SchemaLoadError,
    SchemaViolationError,
)
from bpmnflow.guard import run_guarded

logger = logging.getLogger(__name__)


class XMLDiagnosticWarning(UserWarning):
    """Non-fatal diagnostic reported by the XML parser or schema validator."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line


def _emit_diagnostics(error_log) -> None:
    """Re-emit lxml log entries of WARNING level or above as Python warnings."""
    for entry in error_log.filter_from_warnings():
        warnings.warn(
            XMLDiagnosticWarning(f"{entry.message} (line {entry.line})", entry.line),
            stacklevel=2,
        )


class DocumentLoader:
    """
    Parses a BPMN2 file and validates it against an XML schema.

    Both steps run under the strict-warning guard, so parser and validator
    diagnostics fail the load instead of being dropped.
    """

    warning_category: type[Warning] = Warning

    def __init__(self, schema_path: str | Path):
        self.schema_path = Path(schema_path)

    def load(self, file_path: str | Path) -> etree._ElementTree:
        """
        Parse and validate a BPMN2 document.

        Args:
            file_path: Path to the BPMN2 XML document

        Returns:
            Parsed lxml element tree

        Raises:
            MalformedDocumentError: If the file is missing or not well-formed XML
            SchemaViolationError: If the document does not conform to the schema
            SchemaLoadError: If the schema itself cannot be loaded
        """
        file_path = str(file_path)

        try:
            document = run_guarded(lambda: self._parse(file_path), self.warning_category)
        except GuardError as e:
            raise MalformedDocumentError(
                f'"{file_path}" is not a well-formed XML document: {e}',
                file_path=file_path,
                line_number=getattr(e.__cause__, "line", None),
            ) from e

        try:
            run_guarded(lambda: self._validate(document, file_path), self.warning_category)
        except GuardError as e:
            raise SchemaViolationError(
                f'"{file_path}" does not conform to the BPMN2 schema: {e}',
                file_path=file_path,
                line_number=getattr(e.__cause__, "line", None),
            ) from e

        return document

    def _parse(self, file_path: str) -> etree._ElementTree:
        if not Path(file_path).is_file():
            raise MalformedDocumentError(f"File not found: {file_path}", file_path=file_path)

        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            document = etree.parse(file_path, parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(
                f'"{file_path}" is not a well-formed XML document: {e.msg}',
                file_path=file_path,
                line_number=e.lineno,
            ) from e
        except OSError as e:
            raise MalformedDocumentError(
                f"Error reading {file_path}: {e}", file_path=file_path
            ) from e

        _emit_diagnostics(parser.error_log)
        return document

    def _validate(self, document: etree._ElementTree, file_path: str) -> None:
        schema = self._load_schema()
        if not schema.validate(document):
            error = next(iter(schema.error_log), None)
            detail = f"{error.message} (line {error.line})" if error else "unknown error"
            raise SchemaViolationError(
                f'"{file_path}" does not conform to the BPMN2 schema: {detail}',
                file_path=file_path,
                line_number=error.line if error else None,
            )

        _emit_diagnostics(schema.error_log)

    def _load_schema(self) -> etree.XMLSchema:
        try:
            return etree.XMLSchema(etree.parse(str(self.schema_path)))
        except (etree.XMLSchemaParseError, etree.XMLSyntaxError, OSError) as e:
            logger.error(f"Failed to load schema {self.schema_path}: {e}")
            raise SchemaLoadError(
                f"Failed to load schema {self.schema_path}: {e}",
                file_path=str(self.schema_path),
            ) from e
