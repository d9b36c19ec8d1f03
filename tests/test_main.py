import io
import json
import os
import tempfile
import unittest
import sys
from pathlib import Path
from unittest import mock

import requests

sys.path.append(str(Path(__file__).resolve().parents[1]))

import main

PAYLOAD = {
    "games": [
        {"gameName": "A", "ticketPrice": 200, "totalTicketsPrinted": 100, "validationStatus": "ACTIVE",
         "prizeTiers": [{"winningTickets": 10, "claimedTickets": 0, "prizeAmount": 1000}]},
        {"gameName": "B", "ticketPrice": 200, "totalTicketsPrinted": 100, "validationStatus": "ACTIVE",
         "prizeTiers": [{"winningTickets": 10, "claimedTickets": 0, "prizeAmount": 1500}]},
        {"gameName": "Z", "ticketPrice": 100, "totalTicketsPrinted": 100, "validationStatus": "PENDING",
         "prizeTiers": [{"winningTickets": 10, "claimedTickets": 0, "prizeAmount": 90000}]},
    ]
}


def fake_session(body=PAYLOAD, status=200):
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Bad Gateway"
    response.url = "https://www.njlottery.com/api/v1/instant-games/games/"
    response.encoding = "utf-8"
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response._content_consumed = True
    session = mock.MagicMock()
    session.get.return_value = response
    return session


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config = os.path.join(self.tmpdir.name, "config.toml")
        with open(self.config, "w") as f:
            f.write('[report]\nmode = "list"\npolicy = "simple"\n')

    def tearDown(self):
        self.tmpdir.cleanup()

    def run_main(self, *args, session=None):
        out = io.StringIO()
        code = main.run(["--config", self.config, *args], session=session or fake_session(), out=out)
        return code, out.getvalue()

    def test_list_mode(self):
        code, text = self.run_main()
        self.assertEqual(code, main.EXIT_OK)
        self.assertEqual(text, "A;2.00;-1.00\nB;2.00;-0.50\n")

    def test_best_mode(self):
        code, text = self.run_main("--mode", "best")
        self.assertEqual(code, main.EXIT_OK)
        self.assertEqual(text, "Contest: B\nTicket Price ($): 2.00\nExpected Value ($): -0.50\n\n")

    def test_policy_flag_overrides_config(self):
        session = fake_session({"games": [
            {"gameName": "H", "ticketPrice": 200, "totalTicketsPrinted": 100, "validationStatus": "ACTIVE",
             "prizeTiers": [{"winningTickets": 10, "claimedTickets": 5, "prizeAmount": 1000}]},
        ]})
        _, text = self.run_main("--policy", "adjusted", session=session)
        self.assertEqual(text, "H;2.00;-1.00\n")

    def test_page_size_flag(self):
        session = fake_session()
        self.run_main("--page-size", "25", session=session)
        _, kwargs = session.get.call_args
        self.assertEqual(kwargs["params"], {"size": 25})

    def test_bad_page_size(self):
        code, text = self.run_main("--page-size", "0")
        self.assertEqual(code, main.EXIT_CONFIG_ERROR)
        self.assertEqual(text, "")

    def test_fetch_error_exit_code(self):
        code, text = self.run_main(session=fake_session(b"bad gateway", status=502))
        self.assertEqual(code, main.EXIT_FETCH_ERROR)
        self.assertEqual(text, "")

    def test_decode_error_exit_code(self):
        code, text = self.run_main(session=fake_session(b"not json at all"))
        self.assertEqual(code, main.EXIT_DECODE_ERROR)
        self.assertEqual(text, "")

    def test_zero_timeout_is_config_error(self):
        with open(self.config, "w") as f:
            f.write('[fetch]\ntimeout = 0\n')
        session = fake_session()
        code, text = self.run_main(session=session)
        self.assertEqual(code, main.EXIT_CONFIG_ERROR)
        self.assertEqual(text, "")
        session.get.assert_not_called()

    def test_config_error_exit_code(self):
        with open(self.config, "w") as f:
            f.write('[report]\npolicy = "median"\n')
        code, _ = self.run_main()
        self.assertEqual(code, main.EXIT_CONFIG_ERROR)

if __name__ == '__main__':
    unittest.main()
