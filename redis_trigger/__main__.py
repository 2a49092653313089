import sys

from redis_trigger.main import main

if __name__ == "__main__":
    sys.exit(main())
