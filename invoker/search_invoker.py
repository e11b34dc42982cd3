import logging
from urllib.parse import urljoin, urlparse, urlunparse

import requests

from .errors import DecodeError, NetworkError
from .variants import RequestConfig


def print_observation(value):
    """Default observation sink: write the value to the console"""
    print(value)


class SearchInvoker:
    """Issues a single POST to the search endpoint and decodes the JSON reply.

    There is no retry, timeout or cancellation: a failed request or an
    undecodable body is logged and raised to the caller.
    """

    def __init__(self, base_url, sink=None, session=None):
        self.base_url = self._normalize_url(base_url)
        self.sink = sink or print_observation
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def _normalize_url(self, url):
        """Ensure the base URL has a scheme and a trailing slash"""
        if "://" not in url:
            url = f"http://{url}"
        parsed = urlparse(url)
        path = parsed.path if parsed.path.endswith('/') else parsed.path + '/'
        return urlunparse(parsed._replace(path=path))

    def build_url(self, endpoint):
        return urljoin(self.base_url, endpoint.lstrip('/'))

    def _make_request(self, url, config):
        """Send the POST with a single attempt"""
        self.logger.debug(f"Making POST request to: {url} ({config.content_type})")

        request_kwargs = {
            "headers": config.headers,
            "data": config.encoded_body(),
            "allow_redirects": config.policy.follows_redirects
        }

        try:
            return self.session.post(url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Error sending request to {url}: {str(e)}")
            raise NetworkError(url, e) from e

    def invoke(self, config):
        """Send the configured request and return the decoded JSON body"""
        url = self.build_url(config.endpoint)
        response = self._make_request(url, config)
        self.sink(response)

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Could not decode response from {url} as JSON: {str(e)}")
            raise DecodeError(url, response.status_code, response.text) from e

        self.sink(data)
        return data

    def invoke_request(self, endpoint, headers, body):
        """Same as invoke() with the request given as explicit parameters"""
        return self.invoke(RequestConfig(endpoint, headers, body))


def run_variant(config, base_url, sink=None):
    """Entry point: build an invoker and run one request configuration once"""
    invoker = SearchInvoker(base_url, sink=sink)
    return invoker.invoke(config)
