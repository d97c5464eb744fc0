from git_quick_add.cli import main

main()
