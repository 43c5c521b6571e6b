"""Contract for optional node kinds plugged in through the project config."""

from __future__ import annotations

import typing as typ

import msgspec

from pagetree.errors import ExtensionConfigError

if typ.TYPE_CHECKING:
    from pagetree.registry import Registry

T = typ.TypeVar("T")


@typ.runtime_checkable
class Extension(typ.Protocol):
    """An extension adds entry parsers and renderers before a run starts.

    ``name`` is the stable identifier used in the ``uses`` list of the project
    configuration; ``register`` receives the run's registry and the settings
    given next to the name.
    """

    name: str

    def register(
        self, registry: Registry, config: typ.Mapping[str, typ.Any]
    ) -> None: ...


def decode_extension_config(
    name: str, config: typ.Mapping[str, typ.Any], shape: type[T]
) -> T:
    """Convert an extension's settings mapping into ``shape``.

    Raises
    ------
    ExtensionConfigError
        If a setting has the wrong type.
    """
    try:
        return msgspec.convert(dict(config), type=shape, strict=False)
    except msgspec.ValidationError as exc:
        msg = f"Invalid configuration for extension '{name}': {exc}"
        raise ExtensionConfigError(msg) from exc


__all__ = ["Extension", "decode_extension_config"]
