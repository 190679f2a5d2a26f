from hana.cli import main

main()
