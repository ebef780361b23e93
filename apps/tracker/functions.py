"""
Tracker Payload Parsing
Decodes request bodies and parses the delimited report format:

    IMEI&longitude&height&latitude[&ignored...]

Nothing here touches the database, so every function can be tested
without a request or a store.
"""
import json
import math
from dataclasses import dataclass
from typing import Any, Union

from .exceptions import MalformedReport

DELIMITER = '&'
FIELD_COUNT = 4
FORMAT_HINT = 'IMEI&longitude&height&latitude'
IMEI_MAX_LENGTH = 64


@dataclass(frozen=True)
class JsonBody:
    """
    Body sent as application/json: {"data": "..."} or a bare JSON value

    A present "data" key always wins, even when empty: {"data": ""} yields
    an empty report string (rejected later) instead of the whole object.
    """
    value: Any

    def delimited(self):
        if isinstance(self.value, dict) and 'data' in self.value:
            return _as_text(self.value['data'])
        return _as_text(self.value)


@dataclass(frozen=True)
class RawBody:
    """Body sent as text/plain or with no recognized content type"""
    text: str

    def delimited(self):
        return self.text.strip()


Body = Union[JsonBody, RawBody]


def _as_text(value):
    if isinstance(value, str):
        return value.strip()
    if value is None:
        return ''
    return json.dumps(value).strip()


def decode_body(content_type, body) -> Body:
    """
    Pick the body variant from the Content-Type header

    Args:
        content_type: Raw Content-Type header (may be empty or None)
        body: Request body as bytes or str

    Returns:
        JsonBody or RawBody

    Raises:
        MalformedReport: application/json body that is not valid JSON
    """
    if isinstance(body, bytes):
        body = body.decode('utf-8', errors='replace')
    body = body or ''

    if content_type and 'application/json' in content_type.lower():
        try:
            return JsonBody(json.loads(body))
        except ValueError:
            raise MalformedReport('Invalid JSON body', received=body.strip())

    return RawBody(body)


def parse_coordinate(value):
    """
    Parse one numeric field

    Returns:
        float, or None when the field is not a finite number
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_report(data_string):
    """
    Split and validate a delimited report

    Args:
        data_string: Delimited report text

    Returns:
        dict with imei, longitude, height and latitude

    Raises:
        MalformedReport: fewer than four fields, empty or overlong IMEI,
            or a coordinate that is not a finite number
    """
    data_string = str(data_string).strip()
    fields = data_string.split(DELIMITER)

    if len(fields) < FIELD_COUNT:
        raise MalformedReport(
            f'Invalid data format. Expected: {FORMAT_HINT}',
            received=data_string,
        )

    imei, longitude, height, latitude = (field.strip() for field in fields[:FIELD_COUNT])

    if not imei:
        raise MalformedReport('Missing IMEI', received=data_string)

    if len(imei) > IMEI_MAX_LENGTH:
        raise MalformedReport(
            f'IMEI longer than {IMEI_MAX_LENGTH} characters',
            received=data_string,
        )

    report = {
        'imei': imei,
        'longitude': parse_coordinate(longitude),
        'height': parse_coordinate(height),
        'latitude': parse_coordinate(latitude),
    }

    if report['longitude'] is None or report['latitude'] is None or report['height'] is None:
        raise MalformedReport(
            'Invalid coordinates',
            received=data_string,
            data={'imei': imei, 'longitude': longitude, 'height': height, 'latitude': latitude},
        )

    return report
