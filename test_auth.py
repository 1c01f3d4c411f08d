import unittest
from unittest.mock import patch

import auth


@patch("auth.load_dotenv")
class TestGetSession(unittest.TestCase):
    @patch.dict("os.environ", {}, clear=True)
    @patch("auth.KiteConnect")
    def test_missing_api_key_leaves_client_unset(self, mock_kite, _mock_dotenv):
        with self.assertLogs("auth", level="ERROR") as logs:
            session = auth.get_session()
        self.assertIsNone(session.client)
        self.assertFalse(session.is_authenticated)
        self.assertIn("API_KEY is required", logs.output[0])
        mock_kite.assert_not_called()

    @patch.dict("os.environ", {"API_KEY": "key", "ACCESS_TOKEN": "token"}, clear=True)
    @patch("auth.KiteConnect")
    def test_access_token_is_applied(self, mock_kite, _mock_dotenv):
        session = auth.get_session()
        mock_kite.assert_called_once_with(api_key="key")
        mock_kite.return_value.set_access_token.assert_called_once_with("token")
        self.assertIs(session.client, mock_kite.return_value)
        self.assertTrue(session.is_authenticated)

    @patch.dict("os.environ", {"KITE_API_KEY": "key"}, clear=True)
    @patch("auth.KiteConnect")
    def test_missing_access_token_warns(self, mock_kite, _mock_dotenv):
        with self.assertLogs("auth", level="WARNING"):
            session = auth.get_session()
        self.assertIsNotNone(session.client)
        self.assertFalse(session.is_authenticated)
        mock_kite.return_value.set_access_token.assert_not_called()

    @patch.dict(
        "os.environ",
        {"API_KEY": "key", "KITE_ROOT": "https://example.test", "KITE_TIMEOUT": "5", "KITE_DEBUG": "yes"},
        clear=True,
    )
    @patch("auth.KiteConnect")
    def test_client_options(self, mock_kite, _mock_dotenv):
        auth.get_session()
        mock_kite.assert_called_once_with(api_key="key", root="https://example.test", timeout=5.0, debug=True)

    @patch.dict("os.environ", {"KITE_TIMEOUT": "soon"}, clear=True)
    def test_invalid_timeout_ignored(self, _mock_dotenv):
        with self.assertLogs("auth", level="WARNING"):
            self.assertEqual(auth.get_client_options(), {})


if __name__ == "__main__":
    unittest.main()
