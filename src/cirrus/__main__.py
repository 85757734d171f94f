from cirrus.main import app

app(prog_name="cirrus")
