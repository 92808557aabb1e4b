def test_textbook_run(capsys):
    import rsa_cli

    assert rsa_cli.main(["--run", "textbook", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Encrypted: 2790" in out
    assert "d = e^-1 mod phi: 2753" in out
    assert "Decrypted: 65" in out


def test_roundtrip_run(capsys):
    import rsa_cli

    assert rsa_cli.main(["--run", "roundtrip", "--bits", "64", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Message: 1230948092384098" in out
    assert "Decrypted: 1230948092384098" in out
    assert "Round-trip OK: True" in out


def test_oversized_message_reported(capsys):
    import rsa_cli

    code = rsa_cli.main(["--run", "roundtrip", "--bits", "16", "--plain"])
    assert code == 1
    assert "MessageTooLargeError" in capsys.readouterr().out


def test_invalid_config_reported(capsys):
    import rsa_cli

    assert rsa_cli.main(["--run", "keys", "--bits", "1", "--plain"]) == 2
    assert "bit_length" in capsys.readouterr().out


def test_run_all(capsys):
    import rsa_cli

    rsa_cli.main(["--run", "all", "--bits", "64", "--plain", "--max-attempts", "100000"])
    out = capsys.readouterr().out
    assert "[4/4] Prime generation benchmark" in out
    assert "All demos completed." in out


def test_invoke_reports_failures(capsys):
    import rsa_cli
    from textbook_rsa.errors import KeyValidationError

    def broken():
        raise KeyValidationError("(e * d) mod phi != 1")

    assert rsa_cli._invoke("Broken", broken) is False
    out = capsys.readouterr().out
    assert "RUNNING: Broken" in out
    assert "KeyValidationError" in out
