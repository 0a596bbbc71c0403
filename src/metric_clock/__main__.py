from metric_clock.main import run

run()
