from gitrefs.cli import main

main()
