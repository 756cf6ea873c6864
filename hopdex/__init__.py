"""Client for the Untappd APIv4: beers, breweries and checkins."""

__version__ = "0.1.0"