from linkshortener.server import main


main()
