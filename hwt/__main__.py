from hwt.cli import main

main()
