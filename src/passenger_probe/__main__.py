from passenger_probe.cli.main import app

app(prog_name="passenger-probe")
