"""Protocol for template engines that render listing templates into markdown."""

from pathlib import Path
from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class TemplateRenderer(Protocol):
    """Renders a template file with the given data into text."""

    def render(self, template_path: Path, data: Dict[str, Any], escape: bool) -> str:
        """Render `template_path` with `data`; `escape` requests HTML escaping of interpolated values."""
        ...
