from skillbook.cli import main

main()
