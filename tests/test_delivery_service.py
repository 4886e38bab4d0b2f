from unittest.mock import MagicMock, Mock, patch

import httpx

from prompthook.services.delivery_service import DeliveryResult, deliver_payload


def _mock_client(mock_client_class):
    mock_client = MagicMock()
    mock_client_class.return_value.__enter__.return_value = mock_client
    return mock_client


class TestDeliverPayload:
    @patch("prompthook.services.delivery_service.httpx.Client")
    def test_posts_json_to_url(self, mock_client_class):
        mock_client = _mock_client(mock_client_class)
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.text = "OK"
        mock_client.post.return_value = mock_response

        payload = {"prompt_id": 1, "rendered_prompt": "Hi"}
        result = deliver_payload("https://example.com/webhook", payload, timeout_seconds=5)

        mock_client_class.assert_called_once_with(timeout=5)
        call_args = mock_client.post.call_args
        assert call_args[0][0] == "https://example.com/webhook"
        assert call_args[1]["json"] == payload
        assert call_args[1]["headers"] == {"Content-Type": "application/json"}
        assert result.status_code == 200
        assert result.body == "OK"
        assert result.ok is True
        assert result.error is None

    @patch("prompthook.services.delivery_service.httpx.Client")
    def test_error_status_keeps_raw_body(self, mock_client_class):
        mock_client = _mock_client(mock_client_class)
        mock_response = Mock()
        mock_response.status_code = 500
        mock_response.text = "Server Error"
        mock_client.post.return_value = mock_response

        result = deliver_payload("https://example.com/webhook", {})

        assert result.status_code == 500
        assert result.body == "Server Error"
        assert result.ok is False
        assert result.error is None

    @patch("prompthook.services.delivery_service.httpx.Client")
    def test_request_failure_is_synthesized(self, mock_client_class):
        mock_client = _mock_client(mock_client_class)
        mock_client.post.side_effect = httpx.ConnectError("Name or service not known")

        result = deliver_payload("https://nowhere.invalid/hook", {"a": 1})

        assert result.status_code is None
        assert result.body is None
        assert result.ok is False
        assert "Name or service not known" in result.error

    @patch("prompthook.services.delivery_service.httpx.Client")
    def test_timeout_is_synthesized(self, mock_client_class):
        mock_client = _mock_client(mock_client_class)
        mock_client.post.side_effect = httpx.ReadTimeout("timed out")

        result = deliver_payload("https://example.com/webhook", {})

        assert result.status_code is None
        assert result.error == "timed out"

    @patch("prompthook.services.delivery_service.httpx.Client")
    def test_unencodable_host_is_synthesized(self, mock_client_class):
        mock_client = _mock_client(mock_client_class)
        mock_client.post.side_effect = UnicodeError("encoding with 'idna' codec failed")

        result = deliver_payload("http://" + "a" * 70 + ".com/hook", {})

        assert result.status_code is None
        assert result.body is None
        assert result.ok is False
        assert "idna" in result.error

    @patch("prompthook.services.delivery_service.httpx.Client")
    def test_invalid_url_is_synthesized(self, mock_client_class):
        mock_client = _mock_client(mock_client_class)
        mock_client.post.side_effect = httpx.InvalidURL("Invalid non-printable ASCII character in URL")

        result = deliver_payload("http://example.com/\x00", {})

        assert result.status_code is None
        assert "non-printable" in result.error


class TestDeliveryResult:
    def test_ok_for_2xx_only(self):
        assert DeliveryResult(status_code=204).ok is True
        assert DeliveryResult(status_code=301).ok is False
        assert DeliveryResult(status_code=404).ok is False
        assert DeliveryResult(error="boom").ok is False
