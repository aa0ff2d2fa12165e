"""GNSSReader: raw NMEA client for gpsd.

Connects to a local gpsd instance over TCP (localhost:2947) instead of
opening the serial port directly, so it can coexist with gpsd feeding other
consumers. gpsd is asked for raw NMEA pass-through, and every received byte
is fed to an ``NMEAParser`` exactly as if it had come off the serial line.

Reading strategy:
    gpsd prefixes the stream with JSON reports (VERSION, DEVICES, WATCH).
    Those lines start with '{' and are skipped. Every other line is fed to
    the parser byte by byte. Whenever a sentence passes its checksum and
    updated at least one native field, a ``GNSSData`` snapshot is emitted.
"""

import contextlib
import logging
import socket
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

from nmeastream.gnss.types import GNSSData
from nmeastream.nmea_parser import NMEAParser

__all__ = ["GNSSReader"]

logger = logging.getLogger(__name__)

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # socket read timeout; determines maximum cancel() latency

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'

_JSON_REPORT_PREFIX = b"{"


# --- public API ---------------------------------------------------------------


class GNSSReader:
    """Context manager for reading GNSS snapshots from gpsd's raw NMEA stream.

    Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with GNSSReader() as gnss:
            for data in gnss:
                process(data)

    Single read (useful for one-shot or polling scenarios)::

        with GNSSReader() as gnss:
            data = gnss.read()

    Pass your own ``parser`` to tap extra fields before reading::

        gps = NMEAParser()
        pdop = gps.register_custom_field("GPGSA", 15)
        with GNSSReader(parser=gps) as gnss:
            data = gnss.read()

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
        parser: Parser to feed; a fresh one is created if omitted.
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
        parser: NMEAParser | None = None,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._parser = parser if parser is not None else NMEAParser()
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled: bool = False

    @property
    def parser(self) -> NMEAParser:
        """The parser this reader feeds."""
        return self._parser

    def __enter__(self) -> "GNSSReader":
        """Open the gpsd connection and request raw NMEA."""
        self._sock = socket.create_connection((self._host, self._port))
        try:
            self._sock.settimeout(_TIMEOUT)
            self._sock.sendall(_WATCH_CMD)
        except OSError:
            self._sock.close()
            self._sock = None
            raise
        self._stream = self._sock.makefile("rb")
        self._cancelled = False
        logger.info("Connected to gpsd at %s:%d", self._host, self._port)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the gpsd connection."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.info("Disconnected from gpsd at %s:%d", self._host, self._port)

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and shuts down the socket so that any
        in-progress ``readline()`` unblocks immediately and raises
        ``EOFError``, allowing background threads to exit without waiting
        for the next timeout cycle.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _recv_raw(self, stream: IO[Any]) -> bytes | None:
        """Read one raw line from gpsd; returns ``None`` on timeout retry.

        Raises:
            EOFError: If the stream ended or the connection was closed.
        """
        try:
            raw: bytes = stream.readline()
            if not raw:
                raise EOFError("gpsd stream ended.")
            return raw
        except TimeoutError:
            return None
        except OSError as e:
            logger.warning("gpsd connection lost: %s", e)
            raise EOFError("gpsd connection closed.") from e

    def _read_line(self) -> bytes | None:
        """Read one line; returns ``None`` on timeout retry.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the stream ended or was closed.
        """
        if self._stream is None:
            raise RuntimeError("GNSSReader must be used as a context manager.")
        raw = self._recv_raw(self._stream)
        if raw is None and self._cancelled:
            raise EOFError("gpsd read cancelled.")
        return raw

    def _feed(self, raw: bytes) -> GNSSData | None:
        """Feed one line to the parser; return a snapshot if it updated."""
        if raw.startswith(_JSON_REPORT_PREFIX):
            logger.debug("Skipping gpsd report: %r", raw[:40])
            return None
        result: GNSSData | None = None
        for byte in raw:
            if self._parser.encode(byte) and self._parser.is_updated:
                result = GNSSData.from_parser(self._parser)
        return result

    def read(self) -> GNSSData:
        """Block until a sentence updates the parser and return a snapshot.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._sock is None:
            raise RuntimeError("GNSSReader must be used as a context manager.")
        while True:
            raw = self._read_line()
            if raw is None:
                continue
            result = self._feed(raw)
            if result is not None:
                return result

    def __iter__(self) -> Iterator[GNSSData]:
        """Yield GNSS snapshots indefinitely, one per updating sentence.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.

        Yields:
            ``GNSSData`` for each validated RMC or GGA sentence.
        """
        while True:
            yield self.read()
