from gittown.adapters.errors import CommandFailed


def test_adapter_error_has_message_and_details():
    err = CommandFailed("exit status 2", details={"exit_code": 2})
    assert str(err) == "exit status 2"
    assert err.details["exit_code"] == 2
