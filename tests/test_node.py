from chainkit.node import main


def test_main_prints_greeting(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Hello, world!\n"


def test_main_ignores_arguments(capsys):
    assert main(["--anything"]) == 0
    assert capsys.readouterr().out.strip() == "Hello, world!"