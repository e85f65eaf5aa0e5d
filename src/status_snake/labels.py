"""Score labels: each score index is shown as an HTTP status code.

A new game starts at 100 "Continue". The table is finite, so scores past
511 cycle back to the start.
"""

from __future__ import annotations

from typing import NamedTuple


class StatusLabel(NamedTuple):
    code: int
    message: str


STATUS_LABELS: tuple[StatusLabel, ...] = (
    StatusLabel(100, "Continue"),
    StatusLabel(101, "Switching Protocols"),
    StatusLabel(102, "Processing"),
    StatusLabel(103, "Early Hints"),
    StatusLabel(200, "OK"),
    StatusLabel(201, "Created"),
    StatusLabel(202, "Accepted"),
    StatusLabel(203, "Non-Authoritative Information"),
    StatusLabel(204, "No Content"),
    StatusLabel(205, "Reset Content"),
    StatusLabel(206, "Partial Content"),
    StatusLabel(207, "Multi-Status"),
    StatusLabel(208, "Already Reported"),
    StatusLabel(226, "IM Used"),
    StatusLabel(300, "Multiple Choices"),
    StatusLabel(301, "Moved Permanently"),
    StatusLabel(302, "Found"),
    StatusLabel(303, "See Other"),
    StatusLabel(304, "Not Modified"),
    StatusLabel(305, "Use Proxy"),
    StatusLabel(306, "Switch Proxy"),
    StatusLabel(307, "Temporary Redirect"),
    StatusLabel(308, "Permanent Redirect"),
    StatusLabel(400, "Bad Request"),
    StatusLabel(401, "Unauthorized"),
    StatusLabel(402, "Payment Required"),
    StatusLabel(403, "Forbidden"),
    StatusLabel(404, "Not Found"),
    StatusLabel(405, "Method Not Allowed"),
    StatusLabel(406, "Not Acceptable"),
    StatusLabel(407, "Proxy Authentication Required"),
    StatusLabel(408, "Request Timeout"),
    StatusLabel(409, "Conflict"),
    StatusLabel(410, "Gone"),
    StatusLabel(411, "Length Required"),
    StatusLabel(412, "Precondition Failed"),
    StatusLabel(413, "Payload Too Large"),
    StatusLabel(414, "URI Too Long"),
    StatusLabel(415, "Unsupported Media Type"),
    StatusLabel(416, "Range Not Satisfiable"),
    StatusLabel(417, "Expectation Failed"),
    StatusLabel(418, "I'm a teapot"),
    StatusLabel(421, "Misdirected Request"),
    StatusLabel(422, "Unprocessable Entity"),
    StatusLabel(423, "Locked"),
    StatusLabel(424, "Failed Dependency"),
    StatusLabel(426, "Upgrade Required"),
    StatusLabel(428, "Precondition Required"),
    StatusLabel(429, "Too Many Requests"),
    StatusLabel(431, "Request Header Fields Too Large"),
    StatusLabel(451, "Unavailable For Legal Reasons"),
    StatusLabel(500, "Internal Server Error"),
    StatusLabel(501, "Not Implemented"),
    StatusLabel(502, "Bad Gateway"),
    StatusLabel(503, "Service Unavailable"),
    StatusLabel(504, "Gateway Timeout"),
    StatusLabel(505, "HTTP Version Not Supported"),
    StatusLabel(506, "Variant Also Negotiates"),
    StatusLabel(507, "Insufficient Storage"),
    StatusLabel(508, "Loop Detected"),
    StatusLabel(510, "Not Extended"),
    StatusLabel(511, "Network Authentication Required"),
)

_INDEX_BY_CODE: dict[int, int] = {
    entry.code: i for i, entry in enumerate(STATUS_LABELS)
}


def label(index: int) -> StatusLabel:
    """Return the label for a score, wrapping past the end of the table."""
    return STATUS_LABELS[index % len(STATUS_LABELS)]


def index_of(code: int) -> int | None:
    """Return the score index shown as status *code*, if any."""
    return _INDEX_BY_CODE.get(code)


def parse_score(text: str | None) -> int:
    """Convert a displayed status code back into a score.

    Blank, non-numeric or unknown codes all read as a score of zero.
    """
    if text is None:
        return 0
    try:
        code = int(str(text).strip())
    except ValueError:
        return 0
    index = index_of(code)
    return index if index is not None else 0
