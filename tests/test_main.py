from reef_encounter.main import main


def test_main_reports_setup(capsys):
    assert main(["--players", "3", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Player order:" in out
    assert out.count("Coral reef board") == 3
    assert out.count("Open sea") == 5
    assert "Tiles left in the bag: 151" in out


def test_main_rejects_bad_player_count():
    assert main(["--players", "5"]) == 1
