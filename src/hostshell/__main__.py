from hostshell.cli import main

main()
