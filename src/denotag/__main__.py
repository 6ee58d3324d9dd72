from denotag.cli import main

main()
