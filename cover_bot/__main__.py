from cover_bot.bot import main

main()
