from unittest import TestCase

from web3_personal import PersonalClient, RawTransaction
from web3_personal.common import (
    InvalidAccountError,
    InvalidAddress,
    InvalidAmount,
    NodeError,
    RawTransactionError,
    RpcConnectionError,
    UnexpectedResultType,
)
from web3_personal.transport import HTTPTransport

from .utils_for_tests import (
    RECEIVER,
    SENDER,
    TX_HASH,
    FailingTransport,
    FakeTransport,
    make_error_response,
    make_response,
)


class TestNewAccount(TestCase):
    def test_basic(self):
        transport = FakeTransport(make_response(SENDER))
        client = PersonalClient(transport)
        self.assertEqual(client.new_account("hunter2"), SENDER)
        self.assertEqual(transport.calls[0].method, "personal_newAccount")
        self.assertEqual(transport.calls[0].params, ["hunter2"])

    def test_short_address(self):
        client = PersonalClient(FakeTransport(make_response("0xabc")))
        self.assertRaises(InvalidAccountError, client.new_account, "hunter2")

    def test_wrong_type(self):
        client = PersonalClient(FakeTransport(make_response(123)))
        self.assertRaises(UnexpectedResultType, client.new_account, "hunter2")


class TestImportRawKey(TestCase):
    def test_basic(self):
        key = "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
        transport = FakeTransport(make_response(SENDER))
        client = PersonalClient(transport)
        self.assertEqual(client.import_raw_key(key, "hunter2"), SENDER)
        self.assertEqual(transport.calls[0].method, "personal_importRawKey")
        self.assertEqual(transport.calls[0].params, [key, "hunter2"])

    def test_wrong_type(self):
        client = PersonalClient(FakeTransport(make_response(None)))
        self.assertRaises(UnexpectedResultType, client.import_raw_key, "00", "pw")


class TestUnlock(TestCase):
    def test_basic(self):
        transport = FakeTransport(make_response(True))
        client = PersonalClient(transport)
        self.assertIs(client.unlock(SENDER, "hunter2"), True)
        self.assertEqual(transport.calls[0].method, "personal_unlockAccount")
        self.assertEqual(transport.calls[0].params, [SENDER, "hunter2"])

    def test_false(self):
        client = PersonalClient(FakeTransport(make_response(False)))
        self.assertIs(client.unlock(SENDER, "wrong"), False)

    def test_string_result(self):
        client = PersonalClient(FakeTransport(make_response("true")))
        with self.assertRaises(UnexpectedResultType) as cm:
            client.unlock(SENDER, "hunter2")
        self.assertEqual(cm.exception.method, "personal_unlockAccount")


class TestTransaction(TestCase):
    def test_builder(self):
        client = PersonalClient(FakeTransport())
        tx = client.transaction(SENDER, RECEIVER)
        self.assertIsInstance(tx, RawTransaction)
        self.assertEqual(tx.from_, SENDER)

    def test_bad_address(self):
        client = PersonalClient(FakeTransport())
        self.assertRaises(InvalidAddress, client.transaction, SENDER, "0x" + "b" * 39)


class TestSend(TestCase):
    def test_basic(self):
        transport = FakeTransport(make_response(TX_HASH))
        client = PersonalClient(transport)
        tx = client.transaction(SENDER, RECEIVER).set_amount("1.5").set_gas(21000)

        self.assertEqual(client.send(tx, "hunter2"), TX_HASH)
        call = transport.calls[0]
        self.assertEqual(call.method, "personal_sendTransaction")
        self.assertEqual(
            call.params,
            [
                {
                    "from": SENDER,
                    "to": RECEIVER,
                    "value": "0x14d1120d7b160000",
                    "gas": "0x5208",
                },
                "hunter2",
            ],
        )

    def test_wrong_type(self):
        client = PersonalClient(FakeTransport(make_response({"hash": TX_HASH})))
        tx = client.transaction(SENDER, RECEIVER)
        self.assertRaises(UnexpectedResultType, client.send, tx, "hunter2")

    def test_node_error(self):
        client = PersonalClient(
            FakeTransport(make_error_response(-32000, "insufficient funds"))
        )
        tx = client.transaction(SENDER, RECEIVER).set_amount("1000")
        self.assertRaises(NodeError, client.send, tx, "hunter2")


class TestSendEthereum(TestCase):
    def setUp(self):
        self.data = {
            "from": SENDER,
            "to": RECEIVER,
            "amount": "1.5",
            "gas": 21000,
            "gasPrice": "20",
        }

    def test_basic(self):
        transport = FakeTransport(make_response(TX_HASH))
        client = PersonalClient(transport)
        self.assertEqual(client.send_ethereum(self.data, "hunter2"), TX_HASH)
        self.assertEqual(
            transport.calls[0].params,
            [
                {
                    "from": SENDER,
                    "to": RECEIVER,
                    "value": "0x14d1120d7b160000",
                    "gas": "0x5208",
                    "gasPrice": "0x4a817c800",
                },
                "hunter2",
            ],
        )

    def test_nonce(self):
        transport = FakeTransport(make_response(TX_HASH), make_response(TX_HASH))
        client = PersonalClient(transport)
        client.send_ethereum({**self.data, "nonce": 12}, "hunter2")
        client.send_ethereum({**self.data, "nonce": ""}, "hunter2")
        self.assertEqual(transport.calls[0].params[0]["nonce"], "0xc")
        self.assertNotIn("nonce", transport.calls[1].params[0])

    def test_same_as_builder(self):
        """Both ways of sending ether build the same transaction"""
        transport = FakeTransport(make_response(TX_HASH), make_response(TX_HASH))
        client = PersonalClient(transport)
        client.send_ethereum({**self.data, "nonce": 4}, "pw")
        tx = (
            client.transaction(SENDER, RECEIVER)
            .set_amount("1.5")
            .set_gas(21000)
            .set_gas_price("20")
            .set_nonce(4)
        )
        client.send(tx, "pw")
        self.assertEqual(transport.calls[0], transport.calls[1])

    def test_bad_input_sends_nothing(self):
        transport = FakeTransport()
        client = PersonalClient(transport)
        self.assertRaises(
            InvalidAddress, client.send_ethereum, {**self.data, "to": "0x1"}, "pw"
        )
        self.assertRaises(
            InvalidAmount, client.send_ethereum, {**self.data, "gasPrice": "-1"}, "pw"
        )
        self.assertRaises(
            InvalidAmount, client.send_ethereum, {**self.data, "gas": 0}, "pw"
        )
        self.assertEqual(transport.calls, [])

    def test_missing_field(self):
        data = dict(self.data)
        del data["gas"]
        client = PersonalClient(FakeTransport())
        self.assertRaises(RawTransactionError, client.send_ethereum, data, "pw")


class TestTransportErrors(TestCase):
    def test_not_retried(self):
        transport = FailingTransport()
        client = PersonalClient(transport)
        self.assertRaises(RpcConnectionError, client.unlock, SENDER, "pw")
        self.assertEqual(transport.calls, 1)

    def test_builtin_connection_error(self):
        client = PersonalClient(FailingTransport())
        self.assertRaises(ConnectionError, client.new_account, "pw")


class TestFromFile(TestCase):
    def test_from_file(self):
        client = PersonalClient.from_file("tests/data/config.yml")
        self.assertIsInstance(client.transport, HTTPTransport)
        self.assertEqual(client.transport.endpoint, "http://localhost:8545")  # type: ignore
        self.assertEqual(client.transport.timeout, 5.0)  # type: ignore
