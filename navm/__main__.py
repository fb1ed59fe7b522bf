# navm/__main__.py
from navm.cli import app

app(prog_name="navm")
