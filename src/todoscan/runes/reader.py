"""
Rune Reader

Decodes a byte stream into Unicode code points ("runes") with bounded,
non-destructive lookahead. Bytes are decoded lazily with an incremental
decoder, so undecodable input is only reported once a caller actually reaches
it and everything before that point stays readable.
"""

import codecs
import io
from typing import BinaryIO, Optional, Tuple, Union

from todoscan.shared.domain.exceptions import DecodeError, PeekLimitError

# Maximum number of runes a single peek may request.
DEFAULT_MAX_PEEK = 1024

# Number of bytes pulled from the source per fill.
DEFAULT_CHUNK_SIZE = 4096


class RuneReader:
    """
    Reads runes from a byte source.

    Tracks the current 1-indexed line and 0-indexed column of the next rune
    to be consumed.
    """

    def __init__(
        self,
        source: Union[bytes, bytearray, BinaryIO],
        encoding: str = "utf-8",
        max_peek: int = DEFAULT_MAX_PEEK,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the reader.

        Args:
            source: Raw bytes or a binary file object
            encoding: Codec name used to decode the bytes
            max_peek: Largest lookahead a caller may request
            chunk_size: Bytes read from the source per fill

        Raises:
            DecodeError: If the encoding is unknown
        """
        if max_peek < 1:
            raise ValueError(f"max_peek must be positive, got {max_peek}")

        try:
            decoder_factory = codecs.getincrementaldecoder(encoding)
        except LookupError as e:
            raise DecodeError(
                f"unsupported character set: {encoding}",
                context={"encoding": encoding},
            ) from e

        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))

        self.encoding = encoding
        self.max_peek = max_peek
        self._source = source
        self._decoder = decoder_factory(errors="strict")
        self._chunk_size = max(chunk_size, 1)

        self._buf = ""
        self._pos = 0
        self._eof = False
        self._pending_error: Optional[DecodeError] = None

        self.line = 1
        self.column = 0

    def buffered(self) -> int:
        """Number of decoded runes available without touching the source."""
        return len(self._buf) - self._pos

    def peek(self, n: int) -> Tuple[str, bool]:
        """
        Return the next n runes without consuming them.

        Returns:
            Tuple of (runes, ok). ok is False when end of input was reached
            before n runes were available.

        Raises:
            PeekLimitError: If n exceeds max_peek
            DecodeError: If invalid bytes are reached before any rune is
                available
        """
        if n < 0:
            raise ValueError(f"negative peek count: {n}")
        if n > self.max_peek:
            raise PeekLimitError(
                f"peek of {n} runes exceeds limit of {self.max_peek}",
                context={"requested": n, "max_peek": self.max_peek},
            )

        self._fill(n)
        runes = self._buf[self._pos:self._pos + n]
        return runes, len(runes) == n

    def advance(self, n: int = 1) -> int:
        """
        Consume up to n runes.

        Returns:
            Number of runes consumed; fewer than n only at end of input.
        """
        if n < 0:
            raise ValueError(f"negative advance count: {n}")

        self._fill(n)
        consumed = self._buf[self._pos:self._pos + n]
        self._pos += len(consumed)

        newlines = consumed.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(consumed) - consumed.rfind("\n") - 1
        else:
            self.column += len(consumed)

        return len(consumed)

    def _fill(self, n: int) -> None:
        """Decode from the source until n runes are buffered or input ends."""
        while self.buffered() < n:
            if self._pending_error is not None:
                if self.buffered() == 0:
                    raise self._pending_error
                return
            if self._eof:
                return

            chunk = self._source.read(self._chunk_size)
            final = not chunk
            state = self._decoder.getstate()
            try:
                text = self._decoder.decode(chunk, final=final)
            except UnicodeDecodeError as e:
                text = self._valid_prefix(e, state)
                self._pending_error = DecodeError(
                    f"decoding {self.encoding}: {e.reason}",
                    context={"encoding": self.encoding, "line": self.line},
                )

            if self._pos:
                self._buf = self._buf[self._pos:]
                self._pos = 0
            self._buf += text
            self._eof = final

    def _valid_prefix(self, error: UnicodeDecodeError, state: Tuple[bytes, int]) -> str:
        """
        Decode the bytes that preceded a decoding failure.

        The decoder is rewound to the state it had before the failing call so
        stateful codecs keep their byte order. The failing input already
        includes any bytes the decoder had buffered, so the buffer is cleared.
        """
        self._decoder.setstate((b"", state[1]))
        try:
            return self._decoder.decode(bytes(error.object[:error.start]), final=False)
        except UnicodeDecodeError:
            return ""
