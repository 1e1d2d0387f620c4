import os

# Subprocess CLI runs report coverage when started under `coverage run -p`
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()
