from clean_scaffold.cli import main

main()
