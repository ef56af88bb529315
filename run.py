"""A dev entrypoint for printing fresh Snowflake IDs."""

import os

from snowid import create_generator

generator = create_generator(os.getenv("ENV", "development"))

if __name__ == "__main__":
    for _ in range(int(os.getenv("COUNT", "1"))):
        print(generator.next_id())
