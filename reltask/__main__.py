from reltask.cli.app import main

main()
