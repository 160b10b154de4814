from skillport.apps.cli.app import app

app(prog_name="skillport")
