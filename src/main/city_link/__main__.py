from .main import run

run(prog_name="city-link")
