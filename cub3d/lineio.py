"""Line-by-line reading of scene files."""

from __future__ import annotations

import codecs
from typing import IO, Iterator, Union

_BUFFER_SIZE = 10


def read_lines(stream: IO[Union[str, bytes]]) -> Iterator[str]:
    """Yield lines from a readable stream, each keeping its trailing newline.

    The final line is yielded without a newline if the stream does not end
    with one. Byte streams are decoded as UTF-8. A read error ends the input
    as if the end of the stream had been reached.
    """
    decoder = codecs.getincrementaldecoder("utf-8")()
    pending = ""
    while True:
        try:
            chunk = stream.read(_BUFFER_SIZE)
        except OSError:
            break
        if not chunk:
            break
        if isinstance(chunk, bytes):
            chunk = decoder.decode(chunk)
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    pending += decoder.decode(b"", final=True)
    *complete, pending = pending.split("\n")
    for line in complete:
        yield line + "\n"
    if pending:
        yield pending