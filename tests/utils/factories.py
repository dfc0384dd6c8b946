"""Response payload factories for vtcore tests."""

BASE = "https://vt.test/api/v3"


def error_body(code, message="boom"):
    """Error envelope as returned by the API on failure."""
    return {"error": {"code": code, "message": message}}


def report_body(object_id, object_type, attributes=None):
    return {
        "data": {
            "id": object_id,
            "type": object_type,
            "attributes": attributes or {},
            "links": {"self": f"{BASE}/x/{object_id}"},
        }
    }


def comments_body(start, count, cursor=None):
    """A comments page holding ``count`` comments numbered from ``start``."""
    body = {
        "data": [
            {
                "id": f"i-8.8.8.8-{n}",
                "type": "comment",
                "attributes": {
                    "date": 1700000000 + n,
                    "text": f"comment {n} #dns",
                    "tags": ["dns"],
                    "votes": {"positive": 0, "negative": 0, "abuse": 0},
                },
            }
            for n in range(start, start + count)
        ],
        "meta": {"count": 25},
        "links": {"self": f"{BASE}/ip_addresses/8.8.8.8/comments"},
    }
    if cursor:
        body["meta"]["cursor"] = cursor
    return body


def votes_body(verdicts, cursor=None):
    body = {
        "data": [
            {
                "id": f"v-{n}",
                "type": "vote",
                "attributes": {"date": 1700000000 + n, "verdict": verdict, "value": 1},
            }
            for n, verdict in enumerate(verdicts)
        ],
        "meta": {},
    }
    if cursor:
        body["meta"]["cursor"] = cursor
    return body
