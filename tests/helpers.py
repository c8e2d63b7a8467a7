from urllib.parse import parse_qs


def assert_error_envelope(response, status_code, message=None):
    """Assert an {error} envelope with the given status (and message, when given)."""
    assert response.status_code == status_code, f"Expected {status_code}, got {response.status_code}: {response.text}"
    payload = response.json()
    assert set(payload) == {"error"}, f"Unexpected error envelope: {payload}"
    assert payload["error"], "Error message is empty"
    if message is not None:
        assert payload["error"] == message


def form_fields(request):
    """Decode a url-encoded request body sent by the session manager."""
    return {key: values[0] for key, values in parse_qs(request.content.decode(), keep_blank_values=True).items()}
