r"""Split and decode front matter blocks at the top of content and theme files.

A block is YAML fenced by ``---`` lines or TOML fenced by ``+++`` lines. The
remaining bytes are returned untouched so they can be fed to the template
evaluator.

Examples
--------
>>> meta, body = split_front_matter(b"---\ntitle: Hi\n---\n# Hi\n")
>>> meta
{'title': 'Hi'}
>>> body
b'# Hi\n'
>>> split_front_matter(b"# Hi")
({}, b'# Hi')
"""

from __future__ import annotations

import io
import tomllib
import typing as typ

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import FrontMatterError

_BOM = b"\xef\xbb\xbf"
_FENCES = {b"---": "yaml", b"+++": "toml"}

T = typ.TypeVar("T")


def split_front_matter(
    source: bytes, *, path: str = "<source>"
) -> tuple[dict[str, typ.Any], bytes]:
    """Return the decoded front matter mapping and the remaining body bytes.

    Only the fenced block is decoded, so files without a block (images and
    other binary content included) pass through untouched.

    Parameters
    ----------
    source : bytes
        Raw file contents.
    path : str, optional
        Name of the file, used in error messages.

    Returns
    -------
    tuple[dict[str, Any], bytes]
        The metadata (empty when the file has no block) and the body.

    Raises
    ------
    FrontMatterError
        If the block is unterminated, is not UTF-8, cannot be parsed, or is
        not a mapping.
    """
    text = source.removeprefix(_BOM)
    fence = text.partition(b"\n")[0].strip()
    syntax = _FENCES.get(fence)
    if syntax is None:
        return {}, source

    lines = text.splitlines(keepends=True)
    end = None
    for index in range(1, len(lines)):
        if lines[index].strip() == fence:
            end = index
            break
    if end is None:
        opener = fence.decode("ascii")
        msg = f"Front matter in '{path}' opened with '{opener}' is never closed."
        raise FrontMatterError(msg)

    try:
        block = b"".join(lines[1:end]).decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Front matter in '{path}' is not valid UTF-8: {exc}"
        raise FrontMatterError(msg) from exc
    body = b"".join(lines[end + 1 :])
    return _load_block(block, syntax, path), body


def _load_block(block: str, syntax: str, path: str) -> dict[str, typ.Any]:
    if syntax == "toml":
        try:
            return tomllib.loads(block)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML front matter in '{path}': {exc}"
            raise FrontMatterError(msg) from exc

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(io.StringIO(block))
    except YAMLError as exc:
        msg = f"Invalid YAML front matter in '{path}': {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"Front matter in '{path}' must be a mapping."
        raise FrontMatterError(msg)
    return dict(loaded)


def decode_front_matter(
    metadata: typ.Mapping[str, typ.Any] | None, shape: type[T]
) -> T:
    """Convert a metadata mapping into ``shape`` (a dataclass or msgspec type).

    Unknown keys are ignored and missing keys take the shape's defaults.

    Raises
    ------
    FrontMatterError
        If a value does not match the field type declared by ``shape``.
    """
    if metadata is not None and not isinstance(metadata, typ.Mapping):
        msg = f"Front matter for {shape.__name__} must be a mapping."
        raise FrontMatterError(msg)
    try:
        return msgspec.convert(dict(metadata or {}), type=shape, strict=False)
    except msgspec.ValidationError as exc:
        msg = f"Front matter does not match {shape.__name__}: {exc}"
        raise FrontMatterError(msg) from exc


__all__ = ["decode_front_matter", "split_front_matter"]
