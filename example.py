"""Example: a weather sensor publishing to three displays (in-process, no broker)."""

from weather_pubsub.demo import main

if __name__ == "__main__":
    main()
