"""
Main annotator class that coordinates decoding and projection.
"""

from typing import Iterable, List, Optional

from .config import AnnotatorConfig
from .decoder import BaseDecoder, get_decoder
from .diagnostic import Annotation
from .projector import AnnotationProjector
from .utils import split_lines


class DiagnosticAnnotator:
    """Turns a verifier's JSON output stream into annotations, in input order."""

    def __init__(self, config: AnnotatorConfig):
        self.config = config
        self.decoder: BaseDecoder = get_decoder(config.envelope_mode)
        self.projector = AnnotationProjector(config)

    def process_line(self, line: str) -> Optional[Annotation]:
        """Decode and project a single line. None if the line yields nothing."""
        diagnostic = self.decoder.decode(line)
        if diagnostic is None:
            return None
        return self.projector.project(diagnostic)

    def process_lines(self, lines: Iterable[str]) -> List[Annotation]:
        """Process every line; skipped lines contribute nothing."""
        annotations: List[Annotation] = []
        for line in lines:
            annotation = self.process_line(line)
            if annotation is not None:
                annotations.append(annotation)
        return annotations

    def process_output(self, output: str) -> List[Annotation]:
        """Process a captured stdout blob."""
        return self.process_lines(split_lines(output))
