from io import StringIO
from pathlib import Path
from typing import Any, ClassVar, Dict

from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import LiteralScalarString

from sitelisting.errors import ListingConfigError
from sitelisting.listing import Listing


def _listing_writer() -> YAML:
    """Block style writer with list items indented under their key, as listing front matter is written."""
    writer = YAML(typ="rt")
    writer.default_flow_style = False
    writer.allow_unicode = True
    writer.width = 4096
    writer.indent(mapping=2, sequence=4, offset=2)
    return writer


class ListingYAML:
    """Read listing definitions from YAML (or JSON, a YAML subset) and write them back as YAML.

    Reading uses the safe loader so listings are built from plain dicts and lists. Multi-line strings
    are written as `|-` literal blocks so descriptions keep their line breaks.
    """

    _reader: ClassVar[YAML] = YAML(typ="safe", pure=True)
    _writer: ClassVar[YAML] = _listing_writer()

    @classmethod
    def literalize(cls, val):
        if isinstance(val, str):
            return LiteralScalarString(val) if "\n" in val else val
        elif isinstance(val, dict):
            return {k: cls.literalize(v) for k, v in val.items()}
        elif isinstance(val, (list, tuple)):
            return [cls.literalize(v) for v in val]
        else:
            return val

    @classmethod
    def dump(cls, data: Dict[str, Any]) -> str:
        """Serialize a front matter mapping."""
        out = StringIO()
        cls._writer.dump(cls.literalize(data), out)
        return out.getvalue()

    @classmethod
    def read_mapping(cls, path: Path) -> Dict[str, Any]:
        """The listing mapping in `path`; the document may be the listing itself or `{listing: {...}}`."""
        with path.open(encoding="utf-8") as fh:
            data = cls._reader.load(fh)
        if isinstance(data, dict) and isinstance(data.get("listing"), dict):
            data = data["listing"]
        if not isinstance(data, dict):
            raise ListingConfigError(f"{path} does not contain a listing mapping")
        return data

    @classmethod
    def load_listing(cls, path: Path) -> Listing:
        return Listing.from_dict(cls.read_mapping(path))

    @classmethod
    def dump_listing(cls, listing: Listing) -> str:
        return cls.dump(listing.to_dict())
