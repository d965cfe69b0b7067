class Config:
    # Loopback only
    HOST = '127.0.0.1'
    PORT = 80

    # Relative paths resolve against the working directory, not the package
    STATIC_DIRECTORY = '../frontend/'
