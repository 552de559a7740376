"""Catholic Quotes - a daily quote following the liturgical calendar."""
