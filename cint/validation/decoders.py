"""
Document Decoders

Turns the raw bytes of a config file into a DecodedDocument. The decoder
is selected by file extension; an unsupported extension is rejected before
any decoding is attempted.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, Tuple

import yaml

from cint.validation.context import ConstraintContext, DecodedDocument
from cint.validation.errors import DocumentDecodeError, UnsupportedFormatError
from cint.validation.source_map import build_source_map


logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: Tuple[str, ...] = (".yaml", ".yml", ".json")

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """Safe loader that leaves timestamps as plain strings."""


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _decode_text(file_path: str, data: bytes, format_name: str) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(f"failed to parse {format_name}: {e}", file_path) from e


def decode_yaml(context: ConstraintContext, file_path: str, data: bytes) -> DecodedDocument:
    """Decode YAML bytes into a document."""
    text = _decode_text(file_path, data, "YAML")
    try:
        value = yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError as e:
        raise DocumentDecodeError(f"failed to parse YAML: {e}", file_path) from e
    return context.build_document(file_path, value, build_source_map(text))


def decode_json(context: ConstraintContext, file_path: str, data: bytes) -> DecodedDocument:
    """Decode JSON bytes into a document."""
    text = _decode_text(file_path, data, "JSON")
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentDecodeError(f"failed to parse JSON: {e}", file_path) from e
    return context.build_document(file_path, value, build_source_map(text))


Decoder = Callable[[ConstraintContext, str, bytes], DecodedDocument]

DECODERS: Dict[str, Decoder] = {
    ".yaml": decode_yaml,
    ".yml": decode_yaml,
    ".json": decode_json,
}


def decoder_for(file_path: str) -> Decoder:
    """Select the decoder for a file by its lowercase extension.

    Raises:
        UnsupportedFormatError: If no decoder handles the extension.
    """
    ext = Path(file_path).suffix.lower()
    decoder = DECODERS.get(ext)
    if decoder is None:
        raise UnsupportedFormatError(ext, SUPPORTED_EXTENSIONS, file_path)
    return decoder


def decode_document(context: ConstraintContext, file_path: str, data: bytes) -> DecodedDocument:
    """Decode a config file's bytes according to its extension.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
        DocumentDecodeError: If the bytes are not valid for the format.
    """
    decoder = decoder_for(file_path)
    logger.debug(f"Decoding {file_path} with {decoder.__name__}")
    return decoder(context, file_path, data)
