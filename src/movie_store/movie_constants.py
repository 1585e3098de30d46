# Constants for the in-memory movie collection: sample records loaded at startup and id generation bounds

# Generated ids are decimal strings of an integer drawn from [0, DEFAULT_ID_UPPER_BOUND)
DEFAULT_ID_UPPER_BOUND = 10_000_000

# Sample records present when the service starts, in collection order
SEED_MOVIES = [
    {
        "id": "1",
        "isbn": "438227",
        "title": "Movie One",
        "director": {"firstname": "John", "lastname": "Doe"},
    },
    {
        "id": "2",
        "isbn": "45455",
        "title": "Movie Two",
        "director": {"firstname": "Steve", "lastname": "Smith"},
    },
]
