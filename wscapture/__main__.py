from wscapture.cli import main

main()
