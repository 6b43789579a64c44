import logging
from pathlib import Path
from typing import Optional, Union

import typer

logger = logging.getLogger(__name__)


def is_stdout(output: Optional[str]) -> bool:
    return not output or output == "-"


def write_output(data: Union[bytes, str], output: Optional[str]) -> None:
    """Write command output to a file, or to stdout when output is empty or "-"."""
    if isinstance(data, str):
        data = data.encode("utf-8")

    if is_stdout(output):
        stream = typer.get_binary_stream("stdout")
        stream.write(data)
        stream.flush()
        return

    Path(output).write_bytes(data)
    logger.info("Written to %s (%d bytes)", output, len(data))
