from intolink.main import main


main()
