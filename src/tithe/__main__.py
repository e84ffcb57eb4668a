from tithe.cli.main import main

main()
