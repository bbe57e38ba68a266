from usertasks.main import run

run()
