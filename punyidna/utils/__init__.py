from punyidna.utils.logging import CallerFormatter, get_logger
