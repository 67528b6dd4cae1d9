"""Tests for success-or-error envelope decoding."""

import json

import pytest

from brainzlink.domain.entities import Artist
from brainzlink.domain.exceptions import DecodingError, NotFoundError, ServiceError
from brainzlink.infrastructure.integrations.envelope import (
    ServiceErrorRecord,
    decode_envelope,
    decode_payload,
)

REQUEST = "https://musicbrainz.org/ws/2/artist/x?fmt=json"


class TestDecodeSuccess:
    """Test the success branch."""

    def test_success_payload(self) -> None:
        """Test that a matching payload is parsed."""
        body = json.dumps({"id": "a1", "name": "Nirvana", "sort-name": "Nirvana"})

        artist = decode_envelope(body, Artist.model_validate, REQUEST)

        assert artist.name == "Nirvana"
        assert artist.sort_name == "Nirvana"

    def test_round_trip(self) -> None:
        """Test that serializing a value and decoding it yields an equal value."""
        artist = Artist(id="a1", name="Nirvana", country="US")

        decoded = decode_envelope(json.dumps(artist.to_payload()), Artist.model_validate, REQUEST)

        assert decoded == artist

    def test_success_wins_when_error_keys_present(self) -> None:
        """Test that the success shape is tried first."""
        payload = {"id": "a1", "name": "Error", "error": "x", "help": "y"}

        artist = decode_payload(payload, Artist.model_validate, REQUEST)

        assert artist.name == "Error"


class TestDecodeError:
    """Test the error envelope branch."""

    def test_not_found(self) -> None:
        """Test the exact "Not Found" message."""
        body = json.dumps({"error": "Not Found", "help": "For usage, please see: ..."})

        with pytest.raises(NotFoundError) as exc_info:
            decode_envelope(body, Artist.model_validate, REQUEST)

        assert exc_info.value.request == REQUEST
        assert REQUEST in str(exc_info.value)

    def test_other_error_is_service_error(self) -> None:
        """Test that other messages keep error and help verbatim."""
        body = json.dumps({"error": "Invalid mbid.", "help": "See the docs."})

        with pytest.raises(ServiceError) as exc_info:
            decode_envelope(body, Artist.model_validate, REQUEST)

        assert exc_info.value.error == "Invalid mbid."
        assert exc_info.value.help == "See the docs."
        assert not isinstance(exc_info.value, NotFoundError)

    def test_not_found_match_is_exact(self) -> None:
        """Test that similar messages are not classified as not found."""
        record = ServiceErrorRecord(error="not found", help="")

        assert not record.is_not_found
        assert isinstance(record.into_error(REQUEST), ServiceError)


class TestDecodeFailure:
    """Test bodies matching neither shape."""

    def test_invalid_json(self) -> None:
        """Test that non-JSON bodies are decoding errors."""
        with pytest.raises(DecodingError) as exc_info:
            decode_envelope(b"<html>Bad Gateway</html>", Artist.model_validate, REQUEST)

        assert exc_info.value.body == "<html>Bad Gateway</html>"

    def test_unknown_shape(self) -> None:
        """Test that JSON matching neither shape is a decoding error, not NotFound."""
        with pytest.raises(DecodingError):
            decode_envelope(b'{"unexpected": true}', Artist.model_validate, REQUEST)

    def test_error_without_help(self) -> None:
        """Test that a partial error record doesn't pass as an error envelope."""
        with pytest.raises(DecodingError):
            decode_envelope(b'{"error": "Not Found"}', Artist.model_validate, REQUEST)
