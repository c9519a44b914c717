"""linkedin_cli — command-line front end for the ``voyager`` client."""
