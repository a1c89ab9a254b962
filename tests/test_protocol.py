"""
Tests for out-of-band framing, routing and the UDP transport
"""

import gc
import time
import warnings

import pytest

from pyq3rcon import MalformedFrame, Server, Transport
from pyq3rcon.protocol import OOB_MARKER, ResponseKind, frame, route_payload, unframe


class TestFraming:
    """Test the 0xFFFFFFFF prefix"""

    def test_frame_prepends_marker(self):
        assert frame(b"getstatus") == b"\xff\xff\xff\xffgetstatus"

    @pytest.mark.parametrize("payload", [
        b"",
        b"getstatus",
        b"rcon secret status",
        OOB_MARKER,
        bytes(range(256)),
    ])
    def test_unframe_reverses_frame(self, payload):
        assert unframe(frame(payload)) == payload

    def test_short_datagram_is_malformed(self):
        with pytest.raises(MalformedFrame):
            unframe(b"\xff\xff\xff")

    def test_wrong_marker_is_malformed(self):
        with pytest.raises(MalformedFrame):
            unframe(b"\xff\xff\xff\xfeprint\nhi")

    def test_marker_only_gives_empty_payload(self):
        assert unframe(OOB_MARKER) == b""


class TestRouting:
    """Test shape-based response dispatch"""

    def test_status_header_routes_to_status(self):
        assert route_payload(b"statusResponse\n\\mapname\\q3dm6\n") is ResponseKind.STATUS

    def test_print_routes_to_console(self):
        assert route_payload(b"print\nhello\n") is ResponseKind.CONSOLE

    def test_anything_else_routes_to_console(self):
        assert route_payload(b"disconnect") is ResponseKind.CONSOLE
        assert route_payload(b"") is ResponseKind.CONSOLE

    def test_header_must_end_its_line(self):
        assert route_payload(b"statusResponseX\\a\\b") is ResponseKind.CONSOLE
        assert route_payload(b"statusResponse") is ResponseKind.STATUS


class TestTransport:
    """Test the UDP transport against the mock server"""

    def test_send_before_open_fails(self):
        transport = Transport(Server("127.0.0.1", 27960))
        assert transport.send(b"getstatus") is False
        assert transport.poll(0.0) == []

    def test_request_and_response(self, mock_server):
        with Transport(Server(mock_server.host, mock_server.port)) as transport:
            assert transport.send(b"getstatus")
            assert mock_server.wait_for_requests(1)
            assert mock_server.received[0] == b"\xff\xff\xff\xffgetstatus"

            payloads = []
            for _ in range(100):
                payloads.extend(transport.poll(0.02))
                if payloads:
                    break
            assert payloads[0].startswith(b"statusResponse\n")

    def test_on_payload_event(self, mock_server):
        seen = []
        with Transport(Server(mock_server.host, mock_server.port)) as transport:
            transport.on_payload = seen.append
            transport.send(b"rcon secret status")
            for _ in range(100):
                if transport.poll(0.02):
                    break
        assert seen and seen[0].startswith(b"print\n")

    def test_malformed_datagram_is_dropped(self, mock_server):
        with Transport(Server(mock_server.host, mock_server.port)) as transport:
            mock_server.scenario.answer_status = False
            transport.send(b"getstatus")
            assert mock_server.wait_for_requests(1)

            mock_server.send_raw(b"\xff\xff\xff")
            mock_server.send_raw(b"junk datagram")
            mock_server.send_raw(frame(b"print\nok\n"))

            payloads = []
            for _ in range(100):
                payloads.extend(transport.poll(0.02))
                if payloads:
                    break
            assert payloads == [b"print\nok\n"]

    def test_close_releases_socket(self, mock_server):
        transport = Transport(Server(mock_server.host, mock_server.port))
        assert transport.open()
        assert transport.is_open
        transport.close()
        assert not transport.is_open
        assert transport.send(b"getstatus") is False

    def test_failed_open_closes_socket(self):
        transport = Transport(Server("nonexistent.invalid", 27960))
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert transport.open() is False
            gc.collect()
        assert not transport.is_open
        assert not [w for w in caught if issubclass(w.category, ResourceWarning)]

    def test_poll_reads_bounded_batch(self, mock_server):
        server = Server(mock_server.host, mock_server.port)
        with Transport(server, max_datagrams_per_poll=4) as transport:
            mock_server.scenario.answer_status = False
            transport.send(b"getstatus")
            assert mock_server.wait_for_requests(1)

            expected = [b"print\n%d\n" % i for i in range(10)]
            for payload in expected:
                mock_server.send_raw(frame(payload))
            time.sleep(0.1)

            first = transport.poll(0.5)
            assert first == expected[:4]

            payloads = list(first)
            for _ in range(100):
                payloads.extend(transport.poll(0.02))
                if len(payloads) >= len(expected):
                    break
            assert payloads == expected
