from colorgrid.cli.main import main

main()
