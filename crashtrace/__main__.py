from crashtrace.cli import app

app(prog_name="crashtrace")
