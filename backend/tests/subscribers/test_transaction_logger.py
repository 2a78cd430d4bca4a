from bankdemo.subscribers.transaction_logger import TransactionLogger


def test_writes_message_to_stdout(capsys):
    TransactionLogger()("Deposited: $200.0")
    assert capsys.readouterr().out == "Deposited: $200.0\n"


def test_writes_to_custom_sink(capsys):
    written: list[str] = []
    logger = TransactionLogger(write=written.append)
    logger("Account closed")
    logger("Account closed")
    assert written == ["Account closed", "Account closed"]
    assert capsys.readouterr().out == ""
