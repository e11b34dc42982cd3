"""
Request configurations for the search endpoint
"""
import json

SEARCH_ENDPOINT = "/api/search"


class RequestPolicy:
    """Fetch-style policy attributes carried along with a request"""

    def __init__(self, mode="cors", cache="no-cache", credentials="same-origin",
                 redirect="follow", referrer_policy="no-referrer"):
        self.mode = mode
        self.cache = cache
        self.credentials = credentials
        self.redirect = redirect
        self.referrer_policy = referrer_policy

    @property
    def follows_redirects(self):
        return self.redirect == "follow"

    def as_dict(self):
        return {
            'mode': self.mode,
            'cache': self.cache,
            'credentials': self.credentials,
            'redirect': self.redirect,
            'referrer_policy': self.referrer_policy
        }

    def __repr__(self):
        return f"RequestPolicy({self.as_dict()!r})"


class RequestConfig:
    """Everything needed to issue one POST to the search endpoint"""

    def __init__(self, endpoint, headers, body, policy=None):
        self.endpoint = endpoint
        self.headers = dict(headers)
        self.body = body
        self.policy = policy or RequestPolicy()

    @property
    def content_type(self):
        for name, value in self.headers.items():
            if name.lower() == 'content-type':
                return value
        return None

    def encoded_body(self):
        """Body as it goes on the wire"""
        if self.body is None:
            return None
        return self.body.encode('utf-8')

    def __repr__(self):
        return f"RequestConfig(endpoint={self.endpoint!r}, headers={self.headers!r}, body={self.body!r})"


# Declares JSON but the payload is a JSON-encoded string, not an object.
# Kept as-is: servers see a JSON string value containing the object-like text.
JSON_VARIANT = RequestConfig(
    endpoint=SEARCH_ENDPOINT,
    headers={"Content-Type": "application/json"},
    body=json.dumps('{ "name": "John Doe" }')
)

TEXT_VARIANT = RequestConfig(
    endpoint=SEARCH_ENDPOINT,
    headers={"Content-Type": "text/plain"},
    body="bind texture to buffer"
)

VARIANTS = {
    'json': JSON_VARIANT,
    'text': TEXT_VARIANT
}


def get_variant(name):
    """Look up a named variant, raising KeyError for unknown names"""
    try:
        return VARIANTS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown variant '{name}'. Choose from: {', '.join(sorted(VARIANTS))}")
