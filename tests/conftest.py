"""
Shared fixtures for tests that drive the operation catalog without HTTP.
"""

import pytest


class FakeClient:
    """
    Stands in for TencentCloudClient at the ``call`` seam.

    ``responses`` maps an action name to a Response object, a list of
    Response objects returned in turn, or an exception to raise.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def call(self, service, version, action, payload=None, endpoint=None, region=None):
        self.calls.append({
            'service': service,
            'version': version,
            'action': action,
            'payload': payload,
            'region': region,
        })
        response = self.responses.get(action, {"RequestId": f"req-{action}"})
        if isinstance(response, list):
            response = response.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def actions(self):
        return [call['action'] for call in self.calls]


@pytest.fixture
def fake_client():
    """Create an empty fake client; tests fill in ``responses``."""
    return FakeClient()
