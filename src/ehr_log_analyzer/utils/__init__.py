# Utilities: configuration, logging, exceptions, validation
