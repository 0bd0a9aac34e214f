"""
Main entry point for the UDP Multi Sender application.
"""
from udpmultisender.app import main

if __name__ == "__main__":
    main()
