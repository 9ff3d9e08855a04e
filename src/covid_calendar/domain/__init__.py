"""Domain packages for covid-calendar."""
