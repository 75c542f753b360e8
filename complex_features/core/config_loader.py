"""
Loads complex feature declarations from a properties (or YAML) source into
FeatureConfigEntry objects. Each declaration has the form

    functor = implementation_id[,arg1,arg2,...]

Commas inside arguments cannot be escaped; an argument containing a literal
comma is not supported.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

import javaproperties
import yaml
from pydantic import BaseModel, ConfigDict, Field

from .errors import MalformedEntryError, MissingSourceError

logger = logging.getLogger(__name__)

ConfigSource = Union[str, "os.PathLike[str]", Iterable[str]]

YAML_SUFFIXES = (".yaml", ".yml")


class FeatureConfigEntry(BaseModel):
    """A single functor declaration, immutable once parsed."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    functor: str = Field(min_length=1)
    implementation_id: str
    arguments: Tuple[str, ...] = ()


def parse_value(functor: str, value: str) -> FeatureConfigEntry:
    """
    Splits a declaration value into its implementation id and argument list.

    Args:
        functor: The declared functor (must be non-empty).
        value: ``implementation_id`` optionally followed by ``,arg1,arg2,...``.

    Returns:
        The parsed FeatureConfigEntry.

    Raises:
        MalformedEntryError: If the functor is empty.
    """
    if not functor:
        raise MalformedEntryError(f"cannot have zero-length functor for feature {value!r}")
    parts = value.split(",", 1)
    arguments = parts[1].split(",") if len(parts) > 1 else []
    # "Impl," and "Impl,a,," carry no trailing empty arguments
    while arguments and not arguments[-1]:
        arguments.pop()
    return FeatureConfigEntry(functor=functor, implementation_id=parts[0], arguments=tuple(arguments))


# --- Properties syntax ---

def _collect_properties(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    for key, value in pairs:
        key = key.strip()
        if key in properties:
            logger.debug(f"Duplicate functor '{key}' overrides earlier declaration")
        properties[key] = value.strip()
    return properties


def load_properties(lines: Iterable[str]) -> Dict[str, str]:
    """
    Reads properties-file lines into a key -> value dictionary.

    Supports ``#``/``!`` comments, ``=``, ``:`` or whitespace separators,
    backslash line continuations and the usual ``\\t \\n \\uXXXX`` escapes.
    Keys and values are whitespace-trimmed; later duplicate keys overwrite
    earlier ones.

    Raises:
        MalformedEntryError: On an invalid ``\\uXXXX`` escape.
    """
    text = "\n".join(line.rstrip("\r\n") for line in lines)
    try:
        return javaproperties.loads(text, object_pairs_hook=_collect_properties)
    except javaproperties.InvalidUEscapeError as e:
        raise MalformedEntryError(f"Malformed \\uxxxx encoding in complex feature properties: {e}") from e


# --- Entry construction ---

def _entries_from_properties(properties: Mapping[str, str]) -> List[FeatureConfigEntry]:
    entries = []
    for functor, value in properties.items():
        entry = parse_value(functor, value)
        logger.debug(f"Parsed {entry.functor} -> {entry.implementation_id} {list(entry.arguments)}")
        entries.append(entry)
    return entries


def _entry_from_yaml(functor: Any, value: Any) -> FeatureConfigEntry:
    name = "" if functor is None else str(functor).strip()
    if not name:
        raise MalformedEntryError(f"cannot have zero-length functor for feature {value!r}")
    if value is None or isinstance(value, str):
        return parse_value(name, (value or "").strip())
    if isinstance(value, dict) and "implementation" in value:
        arguments = value.get("arguments") or []
        if not isinstance(arguments, list):
            raise MalformedEntryError(f"arguments for functor '{name}' must be a list, got {type(arguments).__name__}")
        return FeatureConfigEntry(
            functor=name,
            implementation_id=str(value["implementation"]).strip(),
            arguments=tuple(str(arg) for arg in arguments),
        )
    raise MalformedEntryError(
        f"Functor '{name}' must map to 'implementation[,args]' or a mapping with an 'implementation' key"
    )


def _read_yaml(path: Path, encoding: str) -> List[FeatureConfigEntry]:
    with open(path, "r", encoding=encoding) as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML feature configuration at {path}: {e}")
            raise MalformedEntryError(f"Invalid YAML in complex feature configuration at {path}: {e}") from e

    if raw_config is None:
        logger.warning(f"YAML feature configuration is empty: {path}")
        return []
    if not isinstance(raw_config, dict):
        raise MalformedEntryError(
            f"Expected a mapping of functor to implementation in {path}, got {type(raw_config).__name__}"
        )
    return [_entry_from_yaml(functor, value) for functor, value in raw_config.items()]


def _read_path(path: Path, encoding: str) -> List[FeatureConfigEntry]:
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return _read_yaml(path, encoding)
        with open(path, "r", encoding=encoding) as f:
            properties = load_properties(f)
    except FileNotFoundError as e:
        logger.error(f"Complex feature configuration file not found at path: {path}")
        raise MissingSourceError(f"Couldn't find complex feature properties at {path.resolve()}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MissingSourceError(f"Trouble reading complex feature properties at {path.resolve()}") from e
    return _entries_from_properties(properties)


def parse(source: ConfigSource, encoding: str = "utf-8") -> List[FeatureConfigEntry]:
    """
    Parses a complex feature configuration source.

    Args:
        source: A path (``str`` or ``os.PathLike``) to a properties or YAML file,
                an open text stream, or any iterable of properties lines.
        encoding: Text encoding used when ``source`` is a path.

    Returns:
        The declared entries, in the order their functors first appear.

    Raises:
        MissingSourceError: If the source is None or cannot be opened/read.
        MalformedEntryError: If a declaration has an empty functor or bad syntax.
    """
    if source is None:
        raise MissingSourceError("Complex feature properties source cannot be None")

    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        entries = _read_path(path, encoding)
        logger.info(f"Loaded {len(entries)} complex feature declarations from {path}")
        return entries

    try:
        properties = load_properties(source)
    except (OSError, UnicodeDecodeError) as e:
        raise MissingSourceError(f"Trouble reading complex feature properties from {source!r}") from e
    return _entries_from_properties(properties)
