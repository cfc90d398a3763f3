import os


def _int_env(name: str, default: int) -> int:
    return int(os.getenv(name, default))


class Config:
    """
    Server configuration.
    Every setting is read from the environment, falling back to a default.
    """
    # Seconds a solve job may run before it is reported as timed out
    SOLVE_TIMEOUT = _int_env("SOKOBOT_SOLVE_TIMEOUT", 60)

    # Expanded-state cap per job; 0 means unbounded
    MAX_STATES = _int_env("SOKOBOT_MAX_STATES", 1_000_000)

    # Running jobs update states_explored every this many expansions
    PROGRESS_EVERY = _int_env("SOKOBOT_PROGRESS_EVERY", 5_000)

    # Defaults for jobs that don't name their own
    HEURISTIC = os.getenv("SOKOBOT_HEURISTIC", "nearest")
    DEADLOCK = os.getenv("SOKOBOT_DEADLOCK", "corner")

    LOG_LEVEL = os.getenv("SOKOBOT_LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True
    SOLVE_TIMEOUT = 10
    MAX_STATES = 200_000
