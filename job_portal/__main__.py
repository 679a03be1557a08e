from job_portal.main import run


if __name__ == "__main__":
    raise SystemExit(run())
