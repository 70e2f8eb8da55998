from currency_converter.cli.main import app

app()
