from demo import run_demo


def test_run_demo(capsys):
    result = run_demo()
    out = capsys.readouterr().out

    assert result['numbers'].first() == 10
    assert [v.type for v in result['vehicles']] == ["Bus", "Taxi"]
    assert result['payments'] == [True, False]
    ana, luis = result['passengers']
    assert ana.balance == 3000
    assert luis.balance == 3000

    assert "First number: 10" in out
    assert "Vehicle: [2024] - Type: Taxi, Capacity: 4" in out
    assert "Luis does not have enough balance." in out
    assert "Passenger 2 extra: email: luis@mail.com" in out
