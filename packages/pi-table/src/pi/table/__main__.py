from pi.table.cli import main

main()
