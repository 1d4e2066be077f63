from pixtasm.cli.main import main

main()
