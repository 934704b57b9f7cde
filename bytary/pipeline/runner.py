"""
Conversion pipeline: decode(FROM) -> raw bytes -> encode(TO) -> layout.

The whole input is held in memory and the result is produced in one go;
nothing is written unless every stage succeeds.
"""
import os
import sys
from typing import BinaryIO, List, Optional, TextIO

from bytary.encoding_schemes.formats import Format
from bytary.encoding_schemes.registry import decode, encode, is_text_format
from bytary.layout.spacing import layout
from bytary.pipeline.config import PipelineConfig


def _debug_enabled() -> bool:
    return os.environ.get("BYTARY_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _debug_enabled():
        print(f"[bytary] {msg}", file=sys.stderr)


def conversion_path(cfg: PipelineConfig) -> List[Format]:
    """
    Formats the data passes through, e.g. [hex, bytes, bin].

    Empty when both ends are raw bytes (plain copy).
    """
    if cfg.from_format is Format.BYTES and cfg.to_format is Format.BYTES:
        return []
    path = [cfg.from_format]
    if cfg.from_format is not Format.BYTES:
        path.append(Format.BYTES)
    if cfg.to_format is not Format.BYTES:
        path.append(cfg.to_format)
    return path


def describe_operation(cfg: PipelineConfig) -> str:
    path = conversion_path(cfg)
    if not path:
        return "Operation: Copy data"
    return "Operation: " + " => ".join(str(fmt) for fmt in path)


def describe_formatting(cfg: PipelineConfig) -> str:
    return (
        f"Formatting: space every {cfg.space_interval} tokens, "
        f"break line every {cfg.wrap_interval} tokens"
    )


def report_plan(cfg: PipelineConfig, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stderr
    print(describe_operation(cfg), file=stream)
    print(describe_formatting(cfg), file=stream)


def run(data: bytes, cfg: Optional[PipelineConfig] = None) -> bytes:
    """
    Convert `data` from `cfg.from_format` to `cfg.to_format`.

    Raises the first `DecodeError` hit; encoding and layout cannot fail.
    """
    if cfg is None:
        cfg = PipelineConfig()
    if cfg.verbose:
        report_plan(cfg)

    raw = decode(cfg.from_format, data)
    _dbg(f"decoded {len(data)} input bytes as {cfg.from_format} -> {len(raw)} bytes")

    tokens = encode(cfg.to_format, raw)
    _dbg(f"encoded {len(raw)} bytes as {cfg.to_format} -> {len(tokens)} tokens")

    if not is_text_format(cfg.to_format):
        if cfg.layout.enabled:
            _dbg("layout skipped: raw byte output is never spaced or wrapped")
        return b"".join(tokens)

    text = layout(tokens, cfg.space_interval, cfg.wrap_interval)
    return text.encode("ascii")


def convert_stream(
    instream: BinaryIO,
    outstream: BinaryIO,
    cfg: Optional[PipelineConfig] = None,
) -> int:
    """
    Read all of `instream`, convert it and write the result to `outstream`.

    Returns the number of bytes written.
    """
    data = instream.read()
    out = run(data, cfg)
    outstream.write(out)
    return len(out)
