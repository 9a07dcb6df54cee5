from clinical_lists.cli import main

main()
